#
# PROJECT: kanvas
# MODULE: kanvas/tests/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#
