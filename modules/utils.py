from solders.pubkey import Pubkey
from tabulate import tabulate

from models.network import Network
from modules.exceptions import ConfigError

# ANSI color codes
BRIGHT_GREEN = "\033[92m"
RESET = "\033[0m"


def truncate(address) -> str:
    """
    Truncates a base58 address to the format AbCd...wXyZ.
    """
    address = str(address)
    return f"{address[:4]}...{address[-4:]}"


def parse_address(value: str, name: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as err:
        raise ConfigError(f"{name} is not a valid address: {value!r} ({err})") from err


def build_summary_table(
    holder: Pubkey, fee_payer: Pubkey, asset: Pubkey, recipient: Pubkey, network: Network
) -> str:
    """
    Builds a table with the transfer configuration using tabulate.
    """
    table_data = [
        ["Holder", str(holder)],
        ["Fee payer", str(fee_payer)],
        ["Asset", f"{BRIGHT_GREEN}{asset}{RESET}"],
        ["Recipient", str(recipient)],
        ["Cluster", f"{BRIGHT_GREEN}{network.name.upper()}{RESET}"],
    ]

    return tabulate(table_data, tablefmt="double_grid")
