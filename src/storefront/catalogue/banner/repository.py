"""Repository for the Banner aggregate."""

from storefront.catalogue.banner.banner import Banner
from storefront.domain import storefront


@storefront.repository(part_of=Banner)
class BannerRepository:
    def in_display_order(self, active_only: bool = False) -> list[Banner]:
        """Banners sorted by display order, ties broken by id."""
        query = self._dao.query
        if active_only:
            query = query.filter(is_active=True)
        return sorted(query.limit(None).all().items, key=lambda banner: (banner.display_order or 0, banner.id))
