from fastapi import APIRouter, Depends, Request

from catalog_api.adapters.storage import BlobStore
from catalog_api.config.settings import Settings
from catalog_api.dependencies import get_app_settings, get_blob_store

router = APIRouter()


@router.get("/health")
def health_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    blob_store: BlobStore = Depends(get_blob_store),
):
    """
    Health check endpoint for monitoring API status and component readiness.

    Returns status of API, database and storage components along with deployment mode.
    A missing content bucket is not an error: it is created on the first upload.
    """
    health_status = {
        "status": "ok",
        "deployment_mode": settings.deployment_mode,
        "components": {
            "api": "ready",
            "database": "initializing",
            "storage": "initializing"
        },
        "ready": False
    }

    # Check database status
    try:
        request.app.state.document_store.ping()
        health_status["components"]["database"] = "ready"
    except Exception as e:
        health_status["components"]["database"] = f"error: {str(e)}"
        health_status["status"] = "degraded"

    # Check storage status
    try:
        blob_store.s3_client.list_objects_v2(Bucket=blob_store.bucket_name, MaxKeys=1)
        health_status["components"]["storage"] = "ready"
    except blob_store.s3_client.exceptions.NoSuchBucket:
        health_status["components"]["storage"] = "ready"
    except Exception as e:
        health_status["components"]["storage"] = f"error: {str(e)}"
        health_status["status"] = "degraded"

    # Overall ready status
    components_ready = all(
        health_status["components"][comp] == "ready"
        for comp in ["api", "database", "storage"]
    )

    if components_ready:
        health_status["ready"] = True

    return health_status
