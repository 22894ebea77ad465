from django.urls import path

from django_metabox import views

app_name = "metabox"

urlpatterns = [
    path(
        "<str:app_label>/<str:model_name>/<str:object_id>/",
        views.edit_meta,
        name="edit_meta",
    ),
]
