from dataclasses import dataclass


@dataclass
class Network:
    name: str
    explorer: str
    cluster: str = ""  # explorer ?cluster= value, empty for mainnet-beta

    def tx_url(self, signature: str) -> str:
        suffix = f"?cluster={self.cluster}" if self.cluster else ""
        return f"{self.explorer}/tx/{signature}{suffix}"
