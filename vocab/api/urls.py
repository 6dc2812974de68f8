from django.urls import path
from .views import CardDetailView, CardListView, RecentReviewsView, ReviewView, StudyQueueView

urlpatterns = [
    path("study", StudyQueueView.as_view(), name="study"),
    path("reviews", ReviewView.as_view(), name="review"),
    path("reviews/recent", RecentReviewsView.as_view(), name="reviews-recent"),
    path("cards", CardListView.as_view(), name="cards"),
    path("cards/<str:card_id>", CardDetailView.as_view(), name="card-detail"),
]
