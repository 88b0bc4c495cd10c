"""API: camada de borda HTTP do painel.

Valida requests, delega para app/services e traduz resultados em
respostas HTTP. NÃO PODE conter regra de agregação ou de exclusão.
"""
