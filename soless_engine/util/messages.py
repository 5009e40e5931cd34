""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "DOCUMENT_UPLOAD_SUCCESS"   :   "File uploaded successfully.",
    "DOCUMENT_DELETE_SUCCESS"   :   "Document deleted successfully.",
    "PERSONA_UPDATE_SUCCESS"    :   "Persona updated successfully.",
    "TELEGRAM_UPDATE_SUCCESS"   :   "Telegram settings saved. Restart the engine to apply them.",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"           :   "Request body is required.",

    # Conversation Errors
    "CONVERSATION_NOT_FOUND"    :   "Conversation not found.",
    "MISSING_MESSAGE"           :   "Message is required.",
    "INVALID_MESSAGE"           :   "Message must be a non-empty string.",
    "INVALID_ROLE"              :   "Role must be 'user' or 'assistant'.",
    "NOTHING_TO_RETRY"          :   "The conversation is not awaiting a reply.",

    # Completion Errors (user-facing apologies)
    "COMPLETION_FAILED"         :   "Sorry, I couldn't process your message. Please try again later.",
    "COMPLETION_TIMEOUT"        :   "Sorry, that took too long. Please try again.",
    "CONNECTION_FAILED"         :   "Sorry, I'm having trouble connecting. Please try again later.",

    # Persona Errors
    "PERSONA_FIELD_REQUIRED"    :   "Persona field '{}' is required and must be a non-empty string.",

    # Document Errors
    "DOCUMENT_FILE_REQUIRED"    :   "No file uploaded.",
    "DOCUMENT_INVALID_NAME"     :   "Invalid file name.",
    "DOCUMENT_TOO_LARGE"        :   "File exceeds the {} MB upload limit.",
    "DOCUMENT_NOT_FOUND"        :   "Document not found.",
    "UNSUPPORTED_FILE_FORMAT"   :   "Unsupported file format: {file_extension}. Supported formats: PDF, Markdown, TXT",

    # Telegram Errors
    "TELEGRAM_ENABLED_INVALID"  :   "'enabled' must be a boolean.",
    "TELEGRAM_TOKEN_INVALID"    :   "'bot_token' must be a string.",
}
