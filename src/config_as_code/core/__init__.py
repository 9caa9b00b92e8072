"""
Core do Config as Code.

Este pacote contém a implementação canônica e independente de adapters
do engine de configuração como código.

Componentes principais:
    - config       → fontes de configuração, parse e hashing de documentos
    - configurator → contrato de configurator e registro
    - engine       → ciclo de carga e descoberta do grafo de configurators
    - errors       → taxonomia de erros e payload canônico

Limites explícitos:
    - Não contém configurators concretos de domínio
    - Não depende da página de gestão nem de transporte HTTP
"""
