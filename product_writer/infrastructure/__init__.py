# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - llm/: Google Gemini generateContent client
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
