from pydantic import BaseModel, ConfigDict


class UserAccount(BaseModel):
    """Identity payload returned by the account service.

    Unknown fields are kept so the whole record can be embedded in a token.
    """

    id: str | None = None
    mobile_number: str | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    model_config = ConfigDict(extra="allow")
