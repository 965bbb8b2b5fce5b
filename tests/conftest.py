import struct
from types import SimpleNamespace
from unittest.mock import MagicMock

import base58
import pytest
from loguru import logger
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from data.const import MPL_CORE_PROGRAM_ID
from models.transfer import Transfer


def secret_of(keypair: Keypair) -> str:
    return base58.b58encode(bytes(keypair)).decode()


def encode_asset(
    owner: Pubkey,
    ua_type: int = 0,
    ua_address: Pubkey = None,
    name: str = "Test Asset",
    uri: str = "https://example.com/asset.json",
    seq: int = None,
) -> bytes:
    data = bytes([1]) + bytes(owner) + bytes([ua_type])
    if ua_address is not None:
        data += bytes(ua_address)
    for text in (name, uri):
        raw = text.encode()
        data += struct.pack("<I", len(raw)) + raw
    data += b"\x00" if seq is None else b"\x01" + struct.pack("<Q", seq)
    return data


def core_account(data: bytes):
    return SimpleNamespace(owner=MPL_CORE_PROGRAM_ID, data=data, lamports=1_000_000)


@pytest.fixture
def holder_kp():
    return Keypair()


@pytest.fixture
def fee_payer_kp():
    return Keypair()


@pytest.fixture
def accounts():
    """Pubkey -> account object served by the mocked get_account_info."""
    return {}


@pytest.fixture
def client(accounts):
    mock = MagicMock()
    mock.get_account_info.side_effect = lambda pubkey, *args, **kwargs: SimpleNamespace(
        value=accounts.get(pubkey)
    )
    mock.get_latest_blockhash.return_value = SimpleNamespace(
        value=SimpleNamespace(blockhash=Hash.default(), last_valid_block_height=100)
    )
    mock.send_transaction.return_value = SimpleNamespace(value=Signature.default())
    mock.confirm_transaction.return_value = SimpleNamespace(value=[SimpleNamespace(err=None)])
    return mock


@pytest.fixture
def transfer(holder_kp, fee_payer_kp):
    return Transfer(
        rpc_endpoint="https://api.devnet.solana.com",
        holder_secret=secret_of(holder_kp),
        feepayer_secret=secret_of(fee_payer_kp),
        asset_address=str(Pubkey.new_unique()),
        recipient_address=str(Pubkey.new_unique()),
    )


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
