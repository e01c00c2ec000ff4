"""
Sample data ingestion
"""
