from moccasin.boa_tools import VyperContract
from src.mocks import vrf_coordinator_v2_mock

from script.helper_config import LOCAL_CHAIN_ID, get_chain_id

BASE_FEE = 250000000000000000  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas


def deploy_mock(chain_id: int) -> VyperContract | None:
    if chain_id != LOCAL_CHAIN_ID:
        return None

    print("Local network detected, deploying mocks...")
    mock = vrf_coordinator_v2_mock.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"Mock VRF Coordinator at: {mock.address}")
    return mock


def moccasin_main() -> VyperContract | None:
    return deploy_mock(get_chain_id())
