"""URL configuration for the contents application."""

from django.urls import path

from . import views

app_name = 'contents'
urlpatterns = [
    path('', views.ContentListView.as_view(), name='list'),
]
