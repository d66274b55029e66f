from inkwell.schemas.base import CamelModel


class HotTag(CamelModel):
    """Tag with the number of published posts carrying it."""

    display_name: str
    normalized_name: str
    post_count: int
