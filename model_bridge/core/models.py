"""Model identifiers for both sides of the bridge.

OpenAI names are what clients send and what we report back; Gemini names are
what the backend actually runs. Update here when new model versions ship.
"""

# OpenAI models (what callers ask for)
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_TURBO_1106 = "gpt-4-1106-preview"
GPT4_TURBO_0125 = "gpt-4-0125-preview"
GPT4 = "gpt-4"
GPT3_5_TURBO = "gpt-3.5-turbo"
ADA_EMBEDDING_V2 = "text-embedding-ada-002"

GPT4_TURBO_FAMILY = (GPT4_TURBO_PREVIEW, GPT4_TURBO_1106, GPT4_TURBO_0125)

# Gemini models (what the backend runs)
GEMINI_1_5_FLASH_8B = "gemini-1.5-flash-8b"
GEMINI_1_5_PRO = "gemini-1.5-pro-002"
GEMINI_1_5_FLASH = "gemini-1.5-flash-002"
# Never sent to the backend as-is; chat resolution swaps it for pro or flash
GEMINI_1_0_PRO_VISION = "gemini-1.0-pro-vision-latest"
TEXT_EMBEDDING_004 = "text-embedding-004"

# Cheapest tier, used for anything we don't recognise
DEFAULT_GEMINI_MODEL = GEMINI_1_5_FLASH_8B
DEFAULT_OPENAI_MODEL = GPT3_5_TURBO

# Owner labels reported in model listings
OPENAI_OWNER = "openai"
GOOGLE_OWNER = "google"
