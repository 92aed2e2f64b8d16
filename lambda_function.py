"""
Lambda Function Handler - Climate Narratives API
Entrypoint configurado no deploy (lambda_function.lambda_handler); delega para o adapter HTTP
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
