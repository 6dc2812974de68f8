from django.urls import include, path

urlpatterns = [
    path("", include("vocab.api.urls")),
]
