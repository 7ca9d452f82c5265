from drf_spectacular.extensions import OpenApiAuthenticationExtension


class CookieOrHeaderJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "zr_core.iam.auth.CookieOrHeaderJWTAuthentication"
    name = "BearerOrCookieJWT"

    def get_security_definition(self, auto_schema):
        # Swagger "Authorize" only speaks Bearer; the zr_access cookie works too.
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": (
                "Organization or owner access token via `Authorization: Bearer <token>` "
                "or the HttpOnly `zr_access` cookie set by the login endpoints."
            ),
        }
