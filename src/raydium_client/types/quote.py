"""
Swap quote request and response models for the Raydium trade API.

Field aliases follow the service's camelCase wire names; Python code uses
snake_case attributes.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from raydium_client.errors import SerializationError


class QuoteQuery(BaseModel):
    """Parameters of a swap price request.

    Serialized as a query string whose keys follow field order:
    inputMint, outputMint, amount, slippageBps, txVersion.
    """

    model_config = ConfigDict(populate_by_name=True)

    input_mint: str = Field(alias="inputMint", description="Mint of the asset sold")
    output_mint: str = Field(alias="outputMint", description="Mint of the asset bought")
    amount: int = Field(description="Input amount in base units")
    slippage_bps: int = Field(alias="slippageBps", description="Slippage tolerance in basis points")
    tx_version: str = Field(default="V0", alias="txVersion", description="'V0' or 'LEGACY'")

    def to_query_string(self) -> str:
        """Encode as a URL query string.

        Raises:
            SerializationError: If a field cannot be encoded
        """
        try:
            params = self.model_dump(by_alias=True, mode="json")
            return urlencode(params)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(
                f"Failed to encode quote query: {e}",
                cause=e,
            ) from e


class RoutePlanHop(BaseModel):
    """One pool hop of a swap route."""

    model_config = ConfigDict(populate_by_name=True)

    pool_id: str = Field(alias="poolId")
    input_mint: str = Field(alias="inputMint")
    output_mint: str = Field(alias="outputMint")
    fee_mint: str = Field(alias="feeMint")
    fee_rate: int = Field(alias="feeRate")
    fee_amount: str = Field(alias="feeAmount")
    remaining_accounts: list[Any] = Field(default_factory=list, alias="remainingAccounts")
    last_pool_price_x64: str | None = Field(default=None, alias="lastPoolPriceX64")


class SwapQuoteData(BaseModel):
    """Quote payload of a successful swap computation."""

    model_config = ConfigDict(populate_by_name=True)

    swap_type: str = Field(alias="swapType")
    input_mint: str = Field(alias="inputMint")
    input_amount: str = Field(alias="inputAmount")
    output_mint: str = Field(alias="outputMint")
    output_amount: str = Field(alias="outputAmount")
    other_amount_threshold: str = Field(alias="otherAmountThreshold")
    slippage_bps: int = Field(alias="slippageBps")
    price_impact_pct: float = Field(alias="priceImpactPct")
    referrer_amount: str = Field(alias="referrerAmount")
    route_plan: list[RoutePlanHop] = Field(alias="routePlan")


class SwapQuoteResponse(BaseModel):
    """Response envelope of ``/compute/swap-base-in``.

    ``success`` is the service's own verdict; a failed computation still
    decodes, with ``msg`` set and ``data`` absent.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    success: bool
    version: str
    msg: str | None = None
    data: SwapQuoteData | None = None
