"""Infrastructure layer for the Modbus LoRaWAN codec.

Implements the domain interfaces: the catalog-driven frame parser, the
write frame encoder, and extraction of payload bytes from network server
envelopes.
"""
