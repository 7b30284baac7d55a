from django.apps import AppConfig


class PkgLoaderConfig(AppConfig):
    name = 'pkgloader'
    verbose_name = 'Package Loader'

    def ready(self):
        # Import signal definitions
        from . import signals
