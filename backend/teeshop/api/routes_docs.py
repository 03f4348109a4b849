import yaml
from fastapi import APIRouter, Request, Response

router = APIRouter(tags=["docs"])


@router.get("/api-spec.yaml", include_in_schema=False)
def api_spec(request: Request):
    """OpenAPI document of this app, rendered as YAML."""
    body = yaml.safe_dump(request.app.openapi(), sort_keys=False, allow_unicode=True)
    return Response(content=body, media_type="text/yaml")
