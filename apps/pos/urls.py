from rest_framework.routers import SimpleRouter

from .views import PosViewSet


class OptionalSlashRouter(SimpleRouter):
    """SimpleRouter whose routes match with or without a trailing slash"""

    def __init__(self):
        # SimpleRouter only accepts True/False here, so set the regex afterwards
        super().__init__()
        self.trailing_slash = '/?'


router = OptionalSlashRouter()
router.register(r'pos', PosViewSet, basename='pos')

urlpatterns = router.urls
