import base58
from solana.rpc.api import Client
from solana.rpc.commitment import Commitment
from solana.rpc.types import TxOpts
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction

import settings
from data.const import mainnet
from models.network import Network
from modules.exceptions import ConfigError, TransactionFailedError
from modules.logger import logger
from modules.utils import truncate

SEED_LENGTH = 32


def seed_from_secret(secret: str) -> bytearray:
    """
    Decode a base58 secret into an Ed25519 seed. Secrets decoding to 32
    bytes or more keep only their first 32 bytes (a full 64-byte keypair
    export works too), shorter ones are returned whole.
    """
    try:
        decoded = bytearray(base58.b58decode(secret))
    except ValueError as err:
        raise ConfigError(f"Secret is not valid base58: {err}") from err

    if len(decoded) >= SEED_LENGTH:
        seed = decoded[:SEED_LENGTH]
        decoded[:] = bytes(len(decoded))
        return seed

    return decoded


def keypair_from_secret(secret: str) -> Keypair:
    seed = seed_from_secret(secret)
    try:
        return Keypair.from_seed(bytes(seed))
    except (ValueError, TypeError) as err:
        raise ConfigError(
            f"Secret must decode to at least {SEED_LENGTH} bytes, got {len(seed)}"
        ) from err
    finally:
        seed[:] = bytes(len(seed))


class Wallet:
    def __init__(
        self,
        secret: str,
        label: str = "",
        client: Client = None,
        network: Network = mainnet,
    ):
        self.keypair: Keypair = keypair_from_secret(secret)
        self.address: Pubkey = self.keypair.pubkey()
        self.label = f"{label} {truncate(self.address)} |".strip()

        self.client = client
        self.network = network

    def __str__(self):
        return f"Wallet(address={self.address})"

    def send_tx(
        self,
        instructions: list[Instruction],
        signers: list[Keypair] = None,
        tx_label: str = "",
    ) -> str:
        """
        Sign instructions with this wallet as fee payer (plus any extra
        signers), submit once and block until the configured commitment.
        Returns the transaction signature.
        """
        commitment = Commitment(settings.COMMITMENT)
        latest = self.client.get_latest_blockhash(commitment).value

        extra = [kp for kp in signers or [] if kp.pubkey() != self.address]
        tx = Transaction.new_signed_with_payer(
            instructions,
            self.address,
            [self.keypair, *extra],
            latest.blockhash,
        )

        opts = TxOpts(skip_confirmation=True, preflight_commitment=commitment)
        signature = self.client.send_transaction(tx, opts=opts).value
        logger.info(f"{tx_label} | {self.network.tx_url(str(signature))}")

        resp = self.client.confirm_transaction(
            signature,
            commitment,
            last_valid_block_height=latest.last_valid_block_height,
        )
        status = resp.value[0]
        if status is not None and status.err is not None:
            logger.error(f"{tx_label} | Tx failed: {status.err}")
            raise TransactionFailedError(f"Transaction {signature} failed: {status.err}")

        logger.success(f"{tx_label} | Tx confirmed")

        return str(signature)
