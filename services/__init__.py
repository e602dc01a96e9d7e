"""
Service layer for AWS operations and external systems.

This module provides thin wrappers over the AWS SDK clients and the
FileNet ESB endpoint, separating request handling from infrastructure.
"""
