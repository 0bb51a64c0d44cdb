"""JSON shapes for catalog products and cart state."""
from storefront.cart.models import CartItem, CartState
from storefront.catalog.models import Product
from storefront.catalog.pricing import default_selection, resolve_price
from storefront.checkout.summary import free_shipping_remaining, summarize
from storefront.money import format_money, round_money, to_float


def product_card(product: Product, currency: str) -> dict:
    """Catalog listing entry with price range and discount badge."""
    low, high = product.price_range()
    price_display = (
        format_money(low, currency) if low == high
        else f"{format_money(low, currency)} - {format_money(high, currency)}"
    )
    max_original = product.max_original_price()
    return {
        **product.to_dict(),
        "minPrice": to_float(low),
        "maxPrice": to_float(high),
        "priceDisplay": price_display,
        "hasDiscount": product.has_discount(),
        "maxOriginalPrice": to_float(max_original) if max_original is not None else None,
    }


def product_detail(product: Product, currency: str) -> dict:
    """Product page payload: card fields plus the initial variant selection and its price."""
    selection = default_selection(product)
    resolved = resolve_price(product, selection)
    return {
        **product_card(product, currency),
        "defaultSelection": selection,
        "currentPrice": to_float(resolved.unit_price),
        "currentOriginalPrice": (
            to_float(resolved.original_price) if resolved.original_price is not None else None
        ),
    }


def cart_item(item: CartItem, currency: str) -> dict:
    return {
        "productId": item.product_id,
        "productName": item.product.name,
        "image": item.product.images[0] if item.product.images else None,
        "selectedVariants": dict(item.selected_variants),
        "quantity": item.quantity,
        "price": to_float(item.price),
        "lineTotal": to_float(round_money(item.line_total)),
        "lineTotalDisplay": format_money(item.line_total, currency),
    }


def cart_response(state: CartState, currency: str) -> dict:
    """Cart page payload: lines, aggregates and the order summary."""
    summary = summarize(state.total)
    return {
        "items": [cart_item(item, currency) for item in state.items],
        "total": to_float(round_money(state.total)),
        "itemCount": state.item_count,
        "summary": summary.to_dict(),
        "summaryDisplay": summary.formatted(currency),
        "freeShippingRemaining": to_float(round_money(free_shipping_remaining(state.total))),
        "currency": currency,
    }
