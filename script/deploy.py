import os
import time

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src import raffle
from web3 import Web3

from script.helper_config import (
    ETHERSCAN_API_KEY_ENVVAR,
    get_chain_id,
    get_network_config,
    is_development_network,
)

VRF_SUB_FUND_AMOUNT = Web3.to_wei(1, "ether")
CONFIRMATION_POLL_INTERVAL = 2  # seconds


def get_vrf_coordinator_mock() -> VyperContract:
    # deployed on demand by script/deploy_mock.py, see moccasin.toml
    return get_active_network().manifest_named("vrf_coordinator")


def create_subscription(vrf_coordinator: VyperContract) -> int:
    vrf_coordinator.createSubscription()
    # the id comes from the SubscriptionCreated event of the mined transaction
    created = [
        log for log in vrf_coordinator.get_logs() if type(log).__name__ == "SubscriptionCreated"
    ]
    if not created:
        raise ValueError(f"No SubscriptionCreated event emitted by {vrf_coordinator.address}")
    subscription_id = created[0].subId
    print(f"Created VRF subscription {subscription_id}")
    return subscription_id


def fund_subscription(
    vrf_coordinator: VyperContract, subscription_id: int, amount: int = VRF_SUB_FUND_AMOUNT
) -> None:
    vrf_coordinator.fundSubscription(subscription_id, amount)
    print(f"Funded VRF subscription {subscription_id} with {amount}")


def wait_for_confirmations(
    w3: Web3, confirmations: int, poll_interval: float = CONFIRMATION_POLL_INTERVAL
) -> int:
    """
    Blocks until `confirmations` blocks have been mined on top of the
    deployment, counting the block that included it.
    """
    target = w3.eth.block_number + confirmations - 1
    current = w3.eth.block_number
    while current < target:
        time.sleep(poll_interval)
        current = w3.eth.block_number
    return current


def verify(active_network, contract: VyperContract) -> None:
    print("Verifying...")
    result = active_network.moccasin_verify(contract)
    result.wait_for_verification()


def deploy_raffle() -> VyperContract:
    active_network = get_active_network()
    development = is_development_network(active_network.name)
    # forks of live networks never reach the real chain or its explorer
    live = not development and not active_network.is_local_or_forked_network()
    network_config = get_network_config(get_chain_id(active_network))

    vrf_coordinator = None
    if development:
        vrf_coordinator = get_vrf_coordinator_mock()
        vrf_coordinator_address = vrf_coordinator.address
        subscription_id = create_subscription(vrf_coordinator)
        fund_subscription(vrf_coordinator, subscription_id)
    else:
        vrf_coordinator_address = network_config["vrf_coordinator"]
        subscription_id = network_config["subscription_id"]

    entrance_fee = network_config["raffle_entrance_fee"]
    gas_lane = network_config["gas_lane"]
    callback_gas_limit = network_config["callback_gas_limit"]
    interval = network_config["keepers_update_interval"]

    args = [
        subscription_id,
        gas_lane,
        vrf_coordinator_address,
        entrance_fee,
        callback_gas_limit,
        interval,
    ]
    print(f"Raffle constructor args: {args}")
    raffle_contract = raffle.deploy(*args)
    print(f"Raffle deployed at: {raffle_contract.address}")

    if development:
        vrf_coordinator.addConsumer(subscription_id, raffle_contract.address)
        print(f"Added {raffle_contract.address} as consumer of subscription {subscription_id}")
    elif live:
        confirmations = network_config.get("wait_confirmations", 1)
        if confirmations > 1:
            print(f"Waiting for {confirmations} confirmations...")
            wait_for_confirmations(Web3(Web3.HTTPProvider(active_network.url)), confirmations)

    if live and os.environ.get(ETHERSCAN_API_KEY_ENVVAR):
        verify(active_network, raffle_contract)

    return raffle_contract


def moccasin_main() -> VyperContract:
    return deploy_raffle()
