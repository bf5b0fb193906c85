import asyncio, sys, os

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from property_browser.listings.client import PropertiesClient
from property_browser.listings.render import format_price
from property_browser.listings.view import ListingView, ViewState

async def main(search: str = ""):
    view = ListingView(PropertiesClient())
    await view.load()

    if view.state == ViewState.ERROR:
        print(f"Failed to load properties: {view.error}")
        return 1

    view.set_search(search)
    print(f"{view.count} properties found")

    for p in view.filtered:
        print(f"- {p.name} | {p.location} | {p.status} | {format_price(p.min_price)}")
    return 0

if __name__ == "__main__":
    term = " ".join(sys.argv[1:])
    sys.exit(asyncio.run(main(term)))
