from django.urls import re_path
from . import views

app_name = 'tracking'

tracking_view = views.TrackingView.as_view()

urlpatterns = [
    # OPTIONS *                                  - CORS pre-flight
    # GET     /api/tracking/{token}/             - Order snapshot
    # POST    /api/tracking/{token}/approve/     - Approve quote
    # POST    /api/tracking/{token}/reject/      - Reject quote
    # POST    /api/tracking/{token}/question/    - Ask about the quote
    # Trailing slashes are optional; segments after the action are ignored.
    re_path(r'^$', tracking_view, name='token-required'),
    re_path(r'^(?P<token>[^/]+)/?$', tracking_view, name='order'),
    re_path(r'^(?P<token>[^/]+)/(?P<action>[^/]+)(?:/.*)?$', tracking_view, name='order-action'),
]
