"""HTML rendering for the listing view."""
from html import escape

from property_browser.listings.filters import ALL, STATUS_OPTIONS, category_options, tag_options
from property_browser.listings.models import Property
from property_browser.listings.view import ListingView, ViewState

CRORE = 10_000_000
LAKH = 100_000

EMPTY_MESSAGE = "No properties found"
MAX_AMENITIES = 4


def _group_indian(n: int) -> str:
    digits = str(abs(n))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])
    return f"-{digits}" if n < 0 else digits


def format_number(value: int | float) -> str:
    """en-IN grouping with up to three decimals, trailing zeros dropped."""
    whole, frac = f"{abs(value):.3f}".split(".")
    frac = frac.rstrip("0")
    text = _group_indian(int(whole)) + (f".{frac}" if frac else "")
    return f"-{text}" if value < 0 else text


def format_price(price: int | float) -> str:
    if price >= CRORE:
        return f"₹{price / CRORE:.2f} Cr"
    if price >= LAKH:
        return f"₹{price / LAKH:.2f} L"
    return f"₹{_group_indian(int(price))}"


def _price_line(prop: Property) -> str:
    if prop.max_price and prop.max_price != prop.min_price:
        return f"{format_price(prop.min_price)} - {format_price(prop.max_price)}"
    return format_price(prop.min_price)


def render_card(prop: Property) -> str:
    photo = ""
    if prop.photo_url:
        photo = f'<img class="card-photo" src="{escape(prop.photo_url)}" alt="{escape(prop.name)}">'

    amenities = "".join(f"<li>{escape(a)}</li>" for a in prop.amenities[:MAX_AMENITIES])
    hidden = len(prop.amenities) - MAX_AMENITIES
    if hidden > 0:
        amenities += f'<li class="more">+{hidden} more</li>'
    tags = "".join(f'<span class="tag">{escape(t)}</span>' for t in prop.tags)

    return (
        '<article class="property-card">'
        f"{photo}"
        f"<h2>{escape(prop.name)}</h2>"
        f'<p class="location">{escape(prop.location)}</p>'
        f'<p class="status">{escape(prop.status)}</p>'
        f'<p class="price">{escape(_price_line(prop))}</p>'
        f'<p class="details">{escape(prop.total_area)} &middot; {prop.units} units'
        f" &middot; ₹{format_number(prop.price_per_sqft)}/sqft</p>"
        f'<ul class="amenities">{amenities}</ul>'
        f'<div class="tags">{tags}</div>'
        f'<a class="listing-link" href="{escape(prop.listing_url)}" target="_blank" rel="noopener">View listing</a>'
        "</article>"
    )


def _options(values: list[str], selected: str, all_label: str) -> str:
    rows = [f'<option value="{ALL}"{" selected" if selected == ALL else ""}>{all_label}</option>']
    for v in values:
        sel = " selected" if v == selected else ""
        rows.append(f'<option value="{escape(v)}"{sel}>{escape(v)}</option>')
    return "".join(rows)


def _render_filters(view: ListingView) -> str:
    f = view.filter
    low, high = f.price_range
    return (
        '<div class="filters">'
        f'<select name="status">{_options(STATUS_OPTIONS, f.status, "All Status")}</select>'
        f'<select name="category">{_options(category_options(view.properties), f.category, "All Categories")}</select>'
        f'<select name="tag">{_options(tag_options(view.properties), f.tag, "All Tags")}</select>'
        f'<input type="number" name="min_price" value="{low}" placeholder="Min">'
        f'<input type="number" name="max_price" value="{high}" placeholder="Max">'
        "</div>"
    )


def render_view(view: ListingView) -> str:
    if view.state == ViewState.LOADING:
        return '<div class="loading"><p>Loading properties...</p></div>'

    if view.state == ViewState.ERROR:
        return (
            '<div class="error">'
            "<h2>Connection Error</h2>"
            f"<p>Failed to load properties: {escape(view.error or '')}</p>"
            '<form method="get"><button type="submit">Retry Connection</button></form>'
            "</div>"
        )

    header = (
        "<header>"
        "<h1>Property Listings</h1>"
        f'<div class="count">{view.count} properties found</div>'
        '<form method="get">'
        f'<input type="text" name="search" value="{escape(view.filter.search)}" '
        'placeholder="Search by name or location...">'
        '<button type="submit">Search</button>'
        f'<button type="submit" name="filters" value="{"false" if view.show_filters else "true"}">Filters</button>'
        f"{_render_filters(view) if view.show_filters else ''}"
        "</form>"
        "</header>"
    )

    if not view.filtered:
        body = f'<p class="empty">{EMPTY_MESSAGE}</p>'
    else:
        body = '<div class="grid">' + "".join(render_card(p) for p in view.filtered) + "</div>"

    return f"{header}<main>{body}</main>"


def render_page(view: ListingView) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8"><title>Property Listings</title></head>'
        f"<body>{render_view(view)}</body></html>"
    )
