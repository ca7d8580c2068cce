"""Account and fee models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """Marketplace user attached to an account."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    username: str | None = None


class Account(BaseModel):
    """Marketplace account (maker, taker or fee recipient)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    address: str
    config: str | None = None
    profile_img_url: str | None = None
    user: User | None = None


class OrderFee(BaseModel):
    """Fee owed to an account, expressed in basis points (10000 = 100%)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    account: Account
    basis_points: int
