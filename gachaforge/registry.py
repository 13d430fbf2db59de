"""Runtime registry for items and banners."""

from __future__ import annotations

from .domain.banners import BannerRegistry, GachaBanner
from .domain.items import GachaItem, ItemCatalog


class GachaRegistry:
    """Facade around ItemCatalog and BannerRegistry with chainable API."""

    def __init__(self) -> None:
        self.catalog = ItemCatalog()
        self.banners = BannerRegistry()

    def item(self, item: GachaItem) -> "GachaRegistry":
        self.catalog.register_item(item)
        return self

    def banner(self, banner: GachaBanner) -> "GachaRegistry":
        self.banners.register_banner(banner)
        return self

    def items_for(self, banner_id: str) -> dict[str, GachaItem]:
        """Item lookup scoped to one banner's pool."""
        banner = self.banners.get_banner(banner_id)
        return self.catalog.item_map(banner.item_pool)


__all__ = ["GachaRegistry"]
