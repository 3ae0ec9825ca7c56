"""Chat widget server: proxies widget messages to an LLM provider."""
