import boa
from boa.network import NetworkEnv
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src.mocks import vrf_coordinator_v2_mock
from web3 import Web3

from script.helper_config import is_development_network


def advance_time(seconds: int, rpc_url: str | None = None) -> None:
    """
    Moves the chain clock forward. A node behind a NetworkEnv (anvil) keeps
    its own clock, so it is advanced over RPC and a block is mined on top.
    """
    if isinstance(boa.env, NetworkEnv):
        w3 = Web3(Web3.HTTPProvider(rpc_url))
        w3.provider.make_request("evm_increaseTime", [seconds])
        w3.provider.make_request("evm_mine", [])
    else:
        boa.env.time_travel(seconds=seconds)


def mock_keepers(
    raffle_contract: VyperContract, vrf_coordinator: VyperContract, rpc_url: str | None = None
) -> str | None:
    """
    Plays both the keeper and the VRF node on a local chain: skips past the
    raffle interval, requests a winner and fulfills the request through the
    mock coordinator.
    """
    advance_time(raffle_contract.get_interval() + 1, rpc_url)
    if not raffle_contract.check_upkeep():
        print("No upkeep needed")
        return None

    request_id = raffle_contract.request_winner()
    print(f"Performed upkeep with request id {request_id}")
    vrf_coordinator.fulfillRandomWords(request_id, raffle_contract.address)
    winner = raffle_contract.get_recent_winner()
    print(f"The winner is: {winner}")
    return winner


def moccasin_main() -> str | None:
    active_network = get_active_network()
    if not is_development_network(active_network.name):
        print(f"Mock keepers only run on development networks, not {active_network.name}")
        return None

    raffle_contract = active_network.manifest_named("raffle")
    vrf_coordinator = vrf_coordinator_v2_mock.at(raffle_contract.get_vrf_coordinator())
    return mock_keepers(raffle_contract, vrf_coordinator, active_network.url)
