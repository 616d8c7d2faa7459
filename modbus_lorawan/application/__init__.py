"""Application layer for the Modbus LoRaWAN codec.

Use cases orchestrate the domain and infrastructure layers and translate
codec errors into result DTOs for the payload formatter hooks.
"""
