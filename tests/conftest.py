"""
Configuração global de testes
Desliga tracing e fixa o service name antes de importar os módulos da aplicação
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('DD_SERVICE', 'climate-narratives-test')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')
