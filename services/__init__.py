"""
Service layer for AWS operations.

This module provides abstraction over the CloudFormation registry API,
separating handler logic from infrastructure concerns.
"""
