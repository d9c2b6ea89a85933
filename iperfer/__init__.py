"""Iperfer: measure TCP throughput between a sender and a receiver."""
