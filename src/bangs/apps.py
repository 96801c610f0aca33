from django.apps import AppConfig


class BangsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bangs"
