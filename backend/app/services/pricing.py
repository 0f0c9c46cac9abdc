"""Sell price derivation from a unit cost.

Markup is profit relative to cost, margin is profit relative to the sell
price. All three entry points (markup, target margin, fixed sell price)
return the same PricingResult shape. VAT is never applied here;
calculate_vat is a display/publishing helper for callers.
"""

from collections.abc import Iterable
from dataclasses import dataclass


DEFAULT_DISCOUNT_TIERS: tuple[float, ...] = (0, 5, 10, 20, 30, 50)


@dataclass(frozen=True)
class PricingResult:
    sell_price: float
    profit: float
    profit_margin_percent: float
    markup_percent: float


@dataclass(frozen=True)
class DiscountRow:
    discount: float
    price: float
    cost: float
    discount_amount: float
    profit: float


@dataclass(frozen=True)
class VatBreakdown:
    net: float
    tax_amount: float
    gross: float
    rate_percent: float


def _margin_percent(profit: float, sell_price: float) -> float:
    return profit / sell_price * 100 if sell_price > 0 else 0.0


def _markup_percent(profit: float, cost: float) -> float:
    return profit / cost * 100 if cost > 0 else 0.0


def calculate_pricing_from_markup(cost_per_unit: float, markup_percent: float) -> PricingResult:
    """Sell price = cost × (1 + markup / 100).

    Negative markup is allowed and yields a loss-leader price.
    """
    sell_price = cost_per_unit * (1 + markup_percent / 100)
    profit = sell_price - cost_per_unit
    return PricingResult(
        sell_price=sell_price,
        profit=profit,
        profit_margin_percent=_margin_percent(profit, sell_price),
        markup_percent=markup_percent,
    )


def calculate_pricing_from_margin(cost_per_unit: float, target_margin_percent: float) -> PricingResult:
    """Sell price that yields the target margin.

    A margin of 100% or more has no finite price; the cost is returned as
    the sell price in that case. profit_margin_percent always describes
    the returned price, so it is 0 there rather than the requested
    target.
    """
    margin = target_margin_percent / 100
    sell_price = cost_per_unit / (1 - margin) if margin < 1 else cost_per_unit
    profit = sell_price - cost_per_unit
    return PricingResult(
        sell_price=sell_price,
        profit=profit,
        profit_margin_percent=_margin_percent(profit, sell_price),
        markup_percent=_markup_percent(profit, cost_per_unit),
    )


def calculate_pricing_from_sell_price(cost_per_unit: float, sell_price: float) -> PricingResult:
    profit = sell_price - cost_per_unit
    return PricingResult(
        sell_price=sell_price,
        profit=profit,
        profit_margin_percent=_margin_percent(profit, sell_price),
        markup_percent=_markup_percent(profit, cost_per_unit),
    )


def generate_discount_table(
    sell_price: float,
    cost_per_unit: float,
    tiers: Iterable[float] = DEFAULT_DISCOUNT_TIERS,
) -> list[DiscountRow]:
    """Price, discount and profit at each discount tier, in the order given."""
    rows = []
    for discount in tiers:
        price = sell_price * (1 - discount / 100)
        rows.append(
            DiscountRow(
                discount=discount,
                price=price,
                cost=cost_per_unit,
                discount_amount=sell_price - price,
                profit=price - cost_per_unit,
            )
        )
    return rows


def calculate_vat(net_amount: float, rate_percent: float) -> VatBreakdown:
    tax_amount = net_amount * rate_percent / 100
    return VatBreakdown(
        net=net_amount,
        tax_amount=tax_amount,
        gross=net_amount + tax_amount,
        rate_percent=rate_percent,
    )
