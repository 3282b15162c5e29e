from ._base import ApiModel


class HealthResponse(ApiModel):
    ok: bool
