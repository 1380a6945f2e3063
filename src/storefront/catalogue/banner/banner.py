"""Banner aggregate for the storefront home page carousel."""

from protean.fields import Boolean, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Banner:
    id: Integer(identifier=True)
    title: String(required=True, max_length=200)
    subtitle: String(max_length=300)
    image_url: String(required=True, max_length=500)
    button_text: String(max_length=50)
    button_link: String(max_length=500)
    display_order: Integer(default=0)
    is_active: Boolean(default=True)

    def update_details(self, **changes):
        for name in ("title", "subtitle", "image_url", "button_text", "button_link", "display_order", "is_active"):
            if name in changes:
                setattr(self, name, changes[name])
