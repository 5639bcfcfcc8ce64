from moccasin.config import get_active_network

LOCAL_CHAIN_ID = 31337
SEPOLIA_CHAIN_ID = 11155111

# networks where the VRF coordinator is mocked instead of using Chainlink
DEVELOPMENT_NETWORKS = ["pyevm", "eravm", "anvil"]

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

GAS_LANE_SEPOLIA = bytes.fromhex("474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c")

NETWORK_CONFIG = {
    LOCAL_CHAIN_ID: {
        "subscription_id": 588,
        "gas_lane": GAS_LANE_SEPOLIA,
        "keepers_update_interval": 30,
        "raffle_entrance_fee": 10**17,  # 0.1 ETH
        "callback_gas_limit": 500_000,
    },
    SEPOLIA_CHAIN_ID: {
        "subscription_id": 588,
        "gas_lane": GAS_LANE_SEPOLIA,
        "keepers_update_interval": 30,
        "raffle_entrance_fee": 10**17,  # 0.1 ETH
        "callback_gas_limit": 500_000,
        "vrf_coordinator": "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        "wait_confirmations": 6,
    },
}


def is_development_network(network_name: str) -> bool:
    return network_name in DEVELOPMENT_NETWORKS


def get_chain_id(active_network=None) -> int:
    """
    Returns the chain id the deployment parameters are keyed by.

    Development networks all share the local chain id, whatever the
    underlying EVM reports.
    """
    active_network = active_network or get_active_network()
    if is_development_network(active_network.name):
        return LOCAL_CHAIN_ID
    if not active_network.chain_id:
        raise ValueError(f"chain_id is not set for network '{active_network.name}'.")
    return int(active_network.chain_id)


def get_network_config(chain_id: int) -> dict:
    """Returns the deployment parameters for chain_id."""
    network_config = NETWORK_CONFIG.get(chain_id)
    if network_config is None:
        raise ValueError(f"No network config found for chain_id {chain_id}.")
    return network_config
