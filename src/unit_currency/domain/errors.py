class DecodeFailure(ValueError):
    """Raised when an archived object cannot be reconstructed.

    Typical causes are a missing payload, a missing "code" field, or a code string
    that does not name a supported currency.
    """
