import os
import sys

from dotenv import load_dotenv
from solana.rpc.api import Client
from solana.rpc.commitment import Commitment

import settings
from data.const import network_for_endpoint
from models.asset import AssetKind
from models.transfer import Transfer, TransferResult
from modules.core_asset import CoreAssetClient
from modules.exceptions import TransferError
from modules.logger import logger
from modules.spl_token import TokenLedger
from modules.utils import build_summary_table, parse_address
from modules.wallet import Wallet


def process_transfer(transfer: Transfer, client: Client = None) -> TransferResult:
    asset_address = parse_address(transfer.asset_address, "ASSET_ADDRESS")
    recipient = parse_address(transfer.recipient_address, "RECIPIENT_ADDRESS")

    network = network_for_endpoint(transfer.rpc_endpoint)
    if client is None:
        client = Client(transfer.rpc_endpoint, commitment=Commitment(settings.COMMITMENT))

    holder = Wallet(transfer.holder_secret, "[holder]", client, network)
    fee_payer = Wallet(transfer.feepayer_secret, "[fee payer]", client, network)

    summary = build_summary_table(
        holder.address, fee_payer.address, asset_address, recipient, network
    )
    logger.info(f"Transfer configuration\n{summary}")

    core = CoreAssetClient(client)
    probe = core.probe(asset_address)

    core_error = probe.core_error
    if probe.kind is AssetKind.CORE_ASSET:
        try:
            return core.transfer(probe.asset, holder, fee_payer, recipient)
        except Exception as err:
            logger.warning(f"Core Asset transfer failed: {err}")
            core_error = str(err)

    logger.info("Not a Core Asset, trying as SPL token...")
    try:
        return TokenLedger(client).transfer_all(asset_address, holder, fee_payer, recipient)
    except Exception as err:
        raise TransferError(core_error, str(err)) from err


def main():
    load_dotenv(settings.DOTENV_PATH)
    transfer = Transfer.from_env(os.environ)

    result = process_transfer(transfer)

    logger.success(f"{result.kind.value} transfer successful!")
    logger.success(f"Signature: {result.signature}")
    return result


def run():
    try:
        main()
    except KeyboardInterrupt:
        logger.warning("Cancelled by the user")
        sys.exit(1)
    except Exception as err:
        logger.opt(exception=err).error(f"Transfer failed: {err}")
        sys.exit(1)


if __name__ == "__main__":
    run()
