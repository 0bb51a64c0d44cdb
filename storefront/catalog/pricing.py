"""
Pricing Resolver

Turns a product plus a variant selection into the unit price shown and
charged. Dimensions do not combine: each matched variant overwrites the
price found so far, so with several price-bearing dimensions the last one
resolved wins.

Resolution order is the product's option order, then any selected
dimensions the options do not list, in selection order. This makes the
result independent of how the selection mapping was built.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Mapping, Optional

from .models import Product, ProductVariant


@dataclass(frozen=True)
class ResolvedPrice:
    """Unit price for a selection plus the pre-discount price, if any."""
    unit_price: Decimal
    original_price: Optional[Decimal] = None

    @property
    def is_discounted(self) -> bool:
        return self.original_price is not None and self.original_price > self.unit_price


def resolution_order(product: Product, selected_variants: Mapping[str, str]) -> list[str]:
    """Dimensions of the selection in the order prices are applied."""
    ordered = [opt.name for opt in product.options if opt.name in selected_variants]
    ordered.extend(name for name in selected_variants if name not in ordered)
    return ordered


def _selected(
    product: Product, selected_variants: Mapping[str, str]
) -> Iterator[tuple[str, Optional[ProductVariant]]]:
    for dimension in resolution_order(product, selected_variants):
        yield dimension, product.find_variant(dimension, selected_variants[dimension])


def resolve_price(product: Product, selected_variants: Mapping[str, str]) -> ResolvedPrice:
    """
    Resolve the effective unit and original price for a selection.

    Unknown dimensions or variant ids contribute nothing.
    """
    unit_price = product.base_price
    original_price = None

    for _, variant in _selected(product, selected_variants):
        if variant is None:
            continue
        unit_price = variant.price
        if variant.original_price is not None:
            original_price = variant.original_price

    return ResolvedPrice(unit_price=unit_price, original_price=original_price)


def is_selection_in_stock(product: Product, selected_variants: Mapping[str, str]) -> bool:
    """True only if every selected variant exists and is in stock."""
    return all(
        variant is not None and variant.in_stock
        for _, variant in _selected(product, selected_variants)
    )


def default_selection(product: Product) -> dict[str, str]:
    """First in-stock variant of every option; options with nothing in stock are skipped."""
    selection: dict[str, str] = {}
    for option in product.options:
        variant = next((v for v in product.variants.get(option.name, []) if v.in_stock), None)
        if variant is not None:
            selection[option.name] = variant.id
    return selection


def missing_options(product: Product, selected_variants: Mapping[str, str]) -> list[str]:
    """
    Options the selection still has to cover before the product can be added.

    An option counts only while at least one of its variants is in stock; a
    fully sold-out option cannot be chosen and is left out, as in
    default_selection.
    """
    return [
        option.name
        for option in product.options
        if option.name not in selected_variants
        and any(v.in_stock for v in product.variants.get(option.name, []))
    ]
