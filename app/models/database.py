from pydantic import BaseModel, ConfigDict, Field


class ConnectionResult(BaseModel):
    """One row returned by a diagnostic mapper query."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    result: str
    current_time: int = Field(ge=0, alias="currentTime")


class ConnectionTestResponse(BaseModel):
    success: bool
    message: str
    driver_name: str | None = Field(None, alias="driverName")
    database_name: str | None = Field(None, alias="databaseName")
    database_version: str | None = Field(None, alias="databaseVersion")
    url: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class WelcomeResponse(BaseModel):
    application_name: str = Field(alias="applicationName")
    message: str
    timestamp: int

    model_config = ConfigDict(populate_by_name=True)
