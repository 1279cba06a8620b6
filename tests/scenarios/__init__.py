"""End-to-end scenarios for body matchers.

Each scenario drives whole request/response exchanges through matcher
instances the way a host pipeline would.
"""
