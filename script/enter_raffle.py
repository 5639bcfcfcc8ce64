from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network


def enter_raffle(raffle_contract: VyperContract) -> int:
    entrance_fee = raffle_contract.get_entrance_fee()
    raffle_contract.enter_raffle(value=entrance_fee)
    print(f"Entered raffle at {raffle_contract.address} paying {entrance_fee}")
    return raffle_contract.get_player_count()


def moccasin_main() -> int:
    raffle_contract = get_active_network().manifest_named("raffle")
    return enter_raffle(raffle_contract)
