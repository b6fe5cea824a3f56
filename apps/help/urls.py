from django.urls import path, register_converter

from . import views
from .api import ContactUsView
from .pages import HelpPageConverter

register_converter(HelpPageConverter, "helppage")

app_name = "help"

urlpatterns = [
    path("", views.help_index, name="index"),
    path("contact_us/", ContactUsView.as_view(), name="contact_us"),
    path("<helppage:page>/", views.help_page, name="page"),
]
