from solders.pubkey import Pubkey

from models.network import Network

MPL_CORE_PROGRAM_ID = Pubkey.from_string("CoREENxT6tW1HoK8ypY1SxRMZTcVPm7R94rH4PZNhX7d")

# mpl-core account key and instruction discriminators
ASSET_V1_KEY = 1
TRANSFER_V1_DISCRIMINATOR = 14

mainnet = Network(
    name="mainnet-beta",
    explorer="https://explorer.solana.com",
)

devnet = Network(
    name="devnet",
    explorer="https://explorer.solana.com",
    cluster="devnet",
)

testnet = Network(
    name="testnet",
    explorer="https://explorer.solana.com",
    cluster="testnet",
)

CLUSTERS = {
    "mainnet-beta": mainnet,
    "devnet": devnet,
    "testnet": testnet,
}


def network_for_endpoint(rpc_url: str) -> Network:
    url = rpc_url.lower()
    for name in ("devnet", "testnet"):
        if name in url:
            return CLUSTERS[name]
    return mainnet
