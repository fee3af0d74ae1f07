CHAT_SYSTEM_PROMPT = (
    "You are a helpful property management assistant. Provide concise and accurate information "
    "about property management, tenant relations, maintenance, and real estate investment. "
    "Be professional."
)

CHAT_GREETING = "Hi there! 👋 I'm your property management assistant. How can I help you today?"

CHAT_FALLBACK_MESSAGE = (
    "I'm sorry, I'm having trouble connecting to my knowledge base right now. "
    "Please try again later or contact support for assistance."
)

CHAT_ERROR_MESSAGE = "I apologize, but I encountered an error processing your request. Please try again."
