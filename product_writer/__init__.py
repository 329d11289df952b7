# Product Writer - AI Product Description Generator
# ==================================================
# Collects product attributes, asks Google Gemini for a marketing
# description and renders the result as display blocks.
#
# ARCHITECTURE LAYERS:
# - Presentation:   Web dashboard and CLI entry points
# - Application:    Generation use case and session state
# - Domain:         Product details, prompt template, response formatting
# - Infrastructure: Gemini HTTP client, configuration
#
# Swapping the LLM provider only touches infrastructure/llm/.

__version__ = "0.1.0"
