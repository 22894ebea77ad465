from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import ValidationError
from django.forms import Media
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render

from django_metabox.registry import metabox_registry


def _get_record(app_label, model_name, object_id):
    try:
        model = ContentType.objects.get_by_natural_key(app_label, model_name).model_class()
    except ContentType.DoesNotExist:
        raise Http404(f"Unknown model '{app_label}.{model_name}'.")
    if model is None:
        raise Http404(f"Model '{app_label}.{model_name}' is not installed.")
    try:
        return get_object_or_404(model, pk=object_id)
    except (ValueError, ValidationError):
        raise Http404(f"Invalid id '{object_id}'.")


@login_required
def edit_meta(request, app_label, model_name, object_id):
    record = _get_record(app_label, model_name, object_id)
    boxes = metabox_registry.for_record(record)
    if not boxes:
        raise Http404("No meta boxes are enabled for this record.")

    if request.method == "POST":
        for box in boxes:
            box.save(request, record)
        messages.success(request, "Custom fields saved.")
        return redirect(request.path)

    media = Media()
    for box in boxes:
        media += box.media
    context = {
        "record": record,
        "boxes": [(box, box.render(request, record)) for box in boxes],
        "media": media,
    }
    return render(request, "django_metabox/edit.html", context)
