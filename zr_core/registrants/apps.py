from django.apps import AppConfig


class RegistrantsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "zr_core.registrants"
    label = "registrants"
