"""Configuration management for LearnSmart PDF Summarizer."""
import os
import logging
from dotenv import load_dotenv

from logger import setup_logging

# Load environment variables
load_dotenv()

# API Keys
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL") or None

# Server Configuration
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()

# CORS Configuration
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Summarization Configuration
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")
SUMMARY_TEMPERATURE = float(os.getenv("SUMMARY_TEMPERATURE", "0.3"))
SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "1024"))

# Client Configuration
SUMMARIZE_API_URL = os.getenv("SUMMARIZE_API_URL", "http://localhost:3001/api/summarize")
CLIENT_TIMEOUT = float(os.getenv("CLIENT_TIMEOUT", "120"))

# Extraction Configuration
PREVIEW_SCALE = float(os.getenv("PREVIEW_SCALE", "0.5"))

# Logging Configuration
if LOG_FORMAT == "json":
    setup_logging(LOG_LEVEL)
else:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
