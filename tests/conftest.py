from unittest.mock import patch

import boa
import pytest
from moccasin.config import get_active_network, get_config

from script.deploy import deploy_raffle
from script.deploy_mock import deploy_mock
from script.helper_config import LOCAL_CHAIN_ID


@pytest.fixture(scope="session")
def network_setup():
    """Configure the environment based on the active network"""
    config = get_config()
    network_name = get_active_network().name
    if network_name == "anvil":
        # Fork Anvil chain (ensure Anvil is running)
        boa.env.fork(url=config.get_network("anvil").url)
        print(f"Running tests on Anvil at {config.get_network('anvil').url}")
    else:
        # in-memory pyevm is the default environment
        print("Running tests on pyevm")
    return network_name


@pytest.fixture(scope="session")
def account(network_setup):
    """A funded player address"""
    acct = boa.env.generate_address()
    boa.env.set_balance(acct, 10**18)  # 1 ETH initial funding
    return acct


@pytest.fixture(scope="session")
def mock_vrf(network_setup):
    """Deploy the mock VRF coordinator the way the deploy scripts do"""
    return deploy_mock(LOCAL_CHAIN_ID)


@pytest.fixture(scope="session")
def raffle_contract(mock_vrf):
    """Deploy the raffle through the development network branch of deploy_raffle"""
    with patch("script.deploy.get_vrf_coordinator_mock", return_value=mock_vrf):
        return deploy_raffle()
