from prometheus_client import Counter


# Chat Metrics
chats_created_total = Counter("chat_chats_created_total", "Total chats created")
chat_messages_total = Counter("chat_messages_total", "Chat messages appended")
