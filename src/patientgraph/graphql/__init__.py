"""
GraphQL API for patientgraph
"""
