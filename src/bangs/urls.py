from django.urls import path

from . import views

urlpatterns = [
    path("", views.index, name="index"),
    path("navigate/", views.navigate, name="navigate"),
    path("go/", views.go, name="go"),
    path("suggest/", views.suggestions, name="suggest"),
    path("sync/", views.sync, name="sync"),
]
