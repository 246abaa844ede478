"""URLs used by the themevel test suite."""
from django.shortcuts import render
from django.urls import path

from themevel.middleware import theme_type, use_theme


def home(request):
    return render(request, 'home.html')


def assets(request):
    return render(request, 'layouts/base.html')


urlpatterns = [
    path('', home, name='home'),
    path('assets/', assets, name='assets'),
    path('child/', use_theme('child')(home), name='child-home'),
    path('missing/', use_theme('non-existent-theme')(home), name='missing-theme-home'),
    path('backend/', theme_type('backend')(home), name='backend-home'),
]
