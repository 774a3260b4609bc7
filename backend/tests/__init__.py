"""
Homies Event Service - Test Suite

Structure:
- unit/: Unit tests for services, schemas, seeding and configuration
"""
