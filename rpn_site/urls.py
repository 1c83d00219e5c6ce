from django.urls import include, path


urlpatterns = [
    path("api/rpn/", include("converter.urls")),
]
