"""Pydantic models for curve configuration.

Field aliases follow the ledger's camelCase account layout so configs can be
loaded straight from on-chain JSON; snake_case names are accepted too.
"""

from pydantic import BaseModel, Field, ValidationError, model_validator

from launchpad.constants import BPS_DENOMINATOR, U64_MAX
from launchpad.errors import InvalidConfig


class CurveConfig(BaseModel):
    """Parameters of a sale, fixed once the sale is initialized.

    Changing the launchpad configuration never touches sales that already
    exist: each BondingCurveState holds the CurveConfig it was created with.

    Direct construction raises pydantic.ValidationError on bad input; use
    update_config or settings.load_config to get InvalidConfig instead.
    """

    curve_a: int = Field(alias="curveA", gt=0, le=U64_MAX, description="Curve constant.")
    token_supply: int = Field(
        alias="tokenSupply",
        gt=0,
        le=U64_MAX,
        description="Total tokens minted for the sale.",
    )
    token_threshold: int = Field(
        alias="tokenThreshold",
        gt=0,
        le=U64_MAX,
        description="Tokens sold through the curve before it completes.",
    )
    buy_fee_bps: int = Field(default=0, alias="buyFeeBps", ge=0, le=BPS_DENOMINATOR)
    sell_fee_bps: int = Field(default=0, alias="sellFeeBps", ge=0, le=BPS_DENOMINATOR)
    deploy_fee: int = Field(
        default=0,
        alias="deployFee",
        ge=0,
        le=U64_MAX,
        description="Flat fee in lamports charged when a sale is created.",
    )
    authority: str | None = Field(default=None, description="Account allowed to update config.")
    fee_recipient: str | None = Field(
        default=None,
        alias="feeRecipient",
        description="Account that receives trade fees.",
    )
    migration_account: str | None = Field(
        default=None,
        alias="migrationAccount",
        description="Account that receives reserves on withdraw.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _threshold_within_supply(self) -> "CurveConfig":
        if self.token_threshold > self.token_supply:
            raise ValueError(
                f"token_threshold {self.token_threshold} exceeds token_supply {self.token_supply}"
            )
        return self

    @property
    def tokens_outside_curve(self) -> int:
        """Minted tokens never offered on the curve (released on withdraw)."""
        return self.token_supply - self.token_threshold


class ConfigUpdate(BaseModel):
    """Partial configuration change. Fields left as None keep their value.

    Out-of-range fields raise pydantic.ValidationError on construction.
    """

    curve_a: int | None = Field(default=None, alias="curveA", gt=0, le=U64_MAX)
    token_supply: int | None = Field(default=None, alias="tokenSupply", gt=0, le=U64_MAX)
    token_threshold: int | None = Field(default=None, alias="tokenThreshold", gt=0, le=U64_MAX)
    buy_fee_bps: int | None = Field(default=None, alias="buyFeeBps", ge=0, le=BPS_DENOMINATOR)
    sell_fee_bps: int | None = Field(default=None, alias="sellFeeBps", ge=0, le=BPS_DENOMINATOR)
    deploy_fee: int | None = Field(default=None, alias="deployFee", ge=0, le=U64_MAX)
    authority: str | None = None
    fee_recipient: str | None = Field(default=None, alias="feeRecipient")
    migration_account: str | None = Field(default=None, alias="migrationAccount")

    model_config = {"populate_by_name": True}

    @property
    def changes(self) -> dict[str, object]:
        """Fields this update sets, keyed by field name."""
        return self.model_dump(exclude_none=True)


def update_config(config: CurveConfig, update: ConfigUpdate) -> CurveConfig:
    """Apply a partial update, returning a new CurveConfig.

    The input config is left untouched, so sales created from it keep their
    parameters.

    Raises:
        InvalidConfig: If the merged configuration is invalid
            (e.g. threshold above supply)
    """
    merged = {**config.model_dump(), **update.changes}
    try:
        return CurveConfig.model_validate(merged)
    except ValidationError as err:
        raise InvalidConfig(str(err)) from err
