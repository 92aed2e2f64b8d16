"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de cache, providers e o adapter HTTP
"""
