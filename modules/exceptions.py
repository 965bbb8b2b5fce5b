class AssetTransferError(Exception):
    """Base class for everything this script raises on purpose."""


class ConfigError(AssetTransferError):
    def __init__(self, message: str, missing: list[str] = None):
        super().__init__(message)
        self.missing = missing or []


class AssetNotFoundError(AssetTransferError):
    pass


class AssetDecodeError(AssetTransferError):
    pass


class TransferError(AssetTransferError):
    """Both the Core Asset and the SPL token path failed."""

    def __init__(self, core_error: str, token_error: str):
        super().__init__(
            "Failed to transfer asset. Tried both Core Asset and SPL token.\n"
            f"Core Asset error: {core_error}\n"
            f"SPL Token error: {token_error}"
        )
        self.core_error = core_error
        self.token_error = token_error


class TransactionFailedError(AssetTransferError):
    pass
