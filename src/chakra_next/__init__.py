"""chakra-next – re-export Chakra UI components for the Next.js App Router."""

from loguru import logger

__all__ = ["logger"]
