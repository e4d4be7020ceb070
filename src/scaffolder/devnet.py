"""Fixed example data for the generated ``settings/Devnet.toml``.

These are the well-known public development accounts shipped with every new
project.  Local devnet tooling expects these exact mnemonics and addresses,
so they must stay verbatim.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BALANCE = 100_000_000_000_000
DEFAULT_DEPLOYMENT_FEE_RATE = 10


class DevnetAccount(BaseModel):
    """A pre-funded devnet account."""

    model_config = ConfigDict(frozen=True)

    name: str
    mnemonic: str
    balance: int = Field(default=DEFAULT_BALANCE, ge=0)
    secret_key: str
    stx_address: str
    btc_address: str


class StackingOrder(BaseModel):
    """A PoX stacking order submitted on behalf of a devnet wallet."""

    model_config = ConfigDict(frozen=True)

    start_at_cycle: int = 3
    duration: int = 12
    wallet: str
    slots: int
    btc_address: str


DEVNET_ACCOUNTS: tuple[DevnetAccount, ...] = (
    DevnetAccount(
        name="deployer",
        mnemonic=(
            "twice kind fence tip hidden tilt action fragile skin nothing glory cousin "
            "green tomorrow spring wrist shed math olympic multiply hip blue scout claw"
        ),
        secret_key="753b7cc01a1a2e86221266a154af739463fce51219d97e4f856cd7200c3bd2a601",
        stx_address="ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
        btc_address="mqVnk6NPRdhntvfm4hh9vvjiRkFDUuSYsH",
    ),
    DevnetAccount(
        name="wallet_1",
        mnemonic=(
            "sell invite acquire kitten bamboo drastic jelly vivid peace spawn twice guilt "
            "pave pen trash pretty park cube fragile unaware remain midnight betray rebuild"
        ),
        secret_key="7287ba251d44a4d3fd9276c88ce34c5c52a038955511cccaf77e61068649c17801",
        stx_address="ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5",
        btc_address="mr1iPkD9N3RJZZxXRk7xF9d36gffa6exNC",
    ),
    DevnetAccount(
        name="wallet_2",
        mnemonic=(
            "hold excess usual excess ring elephant install account glad dry fragile donkey "
            "gaze humble truck breeze nation gasp vacuum limb head keep delay hospital"
        ),
        secret_key="530d9f61984c888536871c6573073bdfc0058896dc1adfe9a6a10dfacadc209101",
        stx_address="ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG",
        btc_address="muYdXKmX9bByAueDe6KFfHd5Ff1gdN9ErG",
    ),
    DevnetAccount(
        name="wallet_3",
        mnemonic=(
            "cycle puppy glare enroll cost improve round trend wrist mushroom scorpion tower "
            "claim oppose clever elephant dinosaur eight problem before frozen dune wagon high"
        ),
        secret_key="d655b2523bcd65e34889725c73064feb17ceb796831c0e111ba1a552b0f31b3901",
        stx_address="ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC",
        btc_address="mvZtbibDAAA3WLpY7zXXFqRa3T4XSknBX7",
    ),
    DevnetAccount(
        name="wallet_4",
        mnemonic=(
            "board list obtain sugar hour worth raven scout denial thunder horse logic fury "
            "scorpion fold genuine phrase wealth news aim below celery when cabin"
        ),
        secret_key="f9d7206a47f14d2870c163ebab4bf3e70d18f5d14ce1031f3902fbbc894fe4c701",
        stx_address="ST2NEB84ASENDXKYGJPQW86YXQCEFEX2ZQPG87ND",
        btc_address="mg1C76bNTutiCDV3t9nWhZs3Dc8LzUufj8",
    ),
    DevnetAccount(
        name="wallet_5",
        mnemonic=(
            "hurry aunt blame peanut heavy update captain human rice crime juice adult scale "
            "device promote vast project quiz unit note reform update climb purchase"
        ),
        secret_key="3eccc5dac8056590432db6a35d52b9896876a3d5cbdea53b72400bc9c2099fe801",
        stx_address="ST2REHHS5J3CERCRBEPMGH7921Q6PYKAADT7JP2VB",
        btc_address="mweN5WVqadScHdA81aATSdcVr4B6dNokqx",
    ),
    DevnetAccount(
        name="wallet_6",
        mnemonic=(
            "area desk dutch sign gold cricket dawn toward giggle vibrant indoor bench "
            "warfare wagon number tiny universe sand talk dilemma pottery bone trap buddy"
        ),
        secret_key="7036b29cb5e235e5fd9b09ae3e8eec4404e44906814d5d01cbca968a60ed4bfb01",
        stx_address="ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0",
        btc_address="mzxXgV6e4BZSsz8zVHm3TmqbECt7mbuErt",
    ),
    DevnetAccount(
        name="wallet_7",
        mnemonic=(
            "prevent gallery kind limb income control noise together echo rival record "
            "wedding sense uncover school version force bleak nuclear include danger skirt "
            "enact arrow"
        ),
        secret_key="b463f0df6c05d2f156393eee73f8016c5372caa0e9e29a901bb7171d90dc4f1401",
        stx_address="ST3PF13W7Z0RRM42A8VZRVFQ75SV1K26RXEP8YGKJ",
        btc_address="n37mwmru2oaVosgfuvzBwgV2ysCQRrLko7",
    ),
    DevnetAccount(
        name="wallet_8",
        mnemonic=(
            "female adjust gallery certain visit token during great side clown fitness like "
            "hurt clip knife warm bench start reunion globe detail dream depend fortune"
        ),
        secret_key="6a1a754ba863d7bab14adbbc3f8ebb090af9e871ace621d3e5ab634e1422885e01",
        stx_address="ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP",
        btc_address="n2v875jbJ4RjBnTjgbfikDfnwsDV5iUByw",
    ),
    DevnetAccount(
        name="faucet",
        mnemonic=(
            "shadow private easily thought say logic fault paddle word top book during "
            "ignore notable orange flight clock image wealth health outside kitten belt reform"
        ),
        secret_key="de433bdfa14ec43aa1098d5be594c8ffb20a31485ff9de2923b2689471c401b801",
        stx_address="STNHKEPYEPJ8ET55ZZ0M5A34J0R3N5FM2CMMMAZ6",
        btc_address="mjSrB3wS4xab3kYqFktwBzfTdPg367ZJ2d",
    ),
)


def get_account(name: str) -> DevnetAccount:
    """Return the devnet account called *name*.

    Raises:
        KeyError: If no such account exists.
    """
    for account in DEVNET_ACCOUNTS:
        if account.name == name:
            return account
    raise KeyError(name)


# Wallet name -> number of reward slots.
_STACKING_SLOTS: dict[str, int] = {"wallet_1": 2, "wallet_2": 1, "wallet_3": 1}

STACKING_ORDERS: tuple[StackingOrder, ...] = tuple(
    StackingOrder(wallet=wallet, slots=slots, btc_address=get_account(wallet).btc_address)
    for wallet, slots in _STACKING_SLOTS.items()
)
