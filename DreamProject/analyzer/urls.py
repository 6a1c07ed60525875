from django.urls import path
from . import views

urlpatterns = [
    path('', views.dream_analyzer_view, name='dream_analyzer'),
    path('analyse/', views.analyse_dream, name='analyse_dream'),
    path('background/', views.background_view, name='background'),
]
