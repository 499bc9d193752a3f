"""StaticFiles for the Vite build directory with long-term caching of hashed outputs."""
from datetime import datetime, timedelta, timezone

from fastapi.staticfiles import StaticFiles
from starlette.responses import Response as StarletteResponse

from vitetags.manifest import Manifest

IMMUTABLE_MAX_AGE = 31536000


class ManifestStaticFiles(StaticFiles):
    """
    Serves the build output. Files named in the manifest carry a content hash
    in their name, so they are cached for a year and marked immutable; any
    other file only gets ``max_age``.
    """

    def __init__(self, *args, manifest: Manifest, max_age: int = 3600, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_age = max_age
        self.immutable_files = manifest.output_files()

    async def get_response(self, path: str, scope: dict) -> StarletteResponse:
        response = await super().get_response(path, scope)

        if response.status_code == 200:
            if path.lstrip("/") in self.immutable_files:
                response.headers["Cache-Control"] = f"public, max-age={IMMUTABLE_MAX_AGE}, immutable"
                response.headers["Expires"] = self._get_expires_header(IMMUTABLE_MAX_AGE)
            else:
                response.headers["Cache-Control"] = f"public, max-age={self.max_age}"

        return response

    @staticmethod
    def _get_expires_header(max_age: int) -> str:
        expires_date = datetime.now(timezone.utc) + timedelta(seconds=max_age)
        return expires_date.strftime("%a, %d %b %Y %H:%M:%S GMT")
