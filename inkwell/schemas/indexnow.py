"""IndexNow submission payload."""

from pydantic import BaseModel, ConfigDict, Field


class IndexNowRequest(BaseModel):
    """Body posted to an IndexNow endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    host: str
    key: str
    key_location: str = Field(alias="keyLocation")
    url_list: list[str] = Field(alias="urlList")
