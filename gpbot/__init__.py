"""Minecraft protocol client library for headless bots: wire primitives, NBT, packets and a login-driving Bot."""

__version__ = "0.1.0"