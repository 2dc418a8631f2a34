from django.urls import path
from . import views

urlpatterns = [
    path('chat/messages', views.get_chat_messages, name='chat-messages'),
    path('chat/message', views.post_chat_message, name='chat-message'),
]
