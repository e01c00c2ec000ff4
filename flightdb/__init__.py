"""
Storage layer: schema, connection management, seeding and route stats refresh
"""
