"""Banner management: commands and handlers."""

import json

from protean import handle
from protean.fields import Boolean, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.banner.banner import Banner
from storefront.domain import storefront
from storefront.sequence import next_id


@storefront.command(part_of="Banner")
class CreateBanner:
    title: String(required=True, max_length=200)
    subtitle: String(max_length=300)
    image_url: String(required=True, max_length=500)
    button_text: String(max_length=50)
    button_link: String(max_length=500)
    display_order: Integer(default=0)
    is_active: Boolean(default=True)


@storefront.command(part_of="Banner")
class UpdateBanner:
    banner_id: Integer(required=True)
    changes: Text(required=True)


@storefront.command(part_of="Banner")
class DeleteBanner:
    banner_id: Integer(required=True)


@storefront.command_handler(part_of=Banner)
class ManageBannerHandler:
    @handle(CreateBanner)
    def create_banner(self, command):
        banner = Banner(
            id=next_id("banners"),
            title=command.title,
            subtitle=command.subtitle,
            image_url=command.image_url,
            button_text=command.button_text,
            button_link=command.button_link,
            display_order=command.display_order,
            is_active=command.is_active,
        )
        current_domain.repository_for(Banner).add(banner)
        return banner.id

    @handle(UpdateBanner)
    def update_banner(self, command):
        repo = current_domain.repository_for(Banner)
        banner = repo.get(command.banner_id)
        banner.update_details(**json.loads(command.changes))
        repo.add(banner)

    @handle(DeleteBanner)
    def delete_banner(self, command):
        repo = current_domain.repository_for(Banner)
        repo.remove(repo.get(command.banner_id))
