"""
Services module - storage backends, job board rules, AI matching and ranking.
"""
