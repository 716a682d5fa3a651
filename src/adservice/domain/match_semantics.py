"""Match semantics: executable rules for GetAds.

These constants and docstrings lock the semantics. Tests in test_match_semantics.py
encode these as assertions to prevent accidental drift.

RULES (must never be ambiguous):
--------------------------------

1. KEY ORDER
   Matched ads are the concatenation of the catalog lists for each request key,
   in request-key order, then catalog order within a key.

2. DUPLICATE KEYS
   A key repeated in the request repeats its block of ads. No de-duplication.

3. MATCHED PATH
   When at least one key matched, the full concatenation is returned.
   MAX_ADS_TO_SERVE does not apply here.

4. FALLBACK
   When nothing matched (no keys, or only unknown keys), return
   min(MAX_ADS_TO_SERVE, len(all_ads)) distinct ads sampled without
   replacement from the whole catalog, in random order.

5. ABSENT REQUEST
   A missing request object is an InvalidRequestError, raised before any lookup.
   An empty key list is a valid request and takes the fallback path.
"""

# Rule names for reference in tests and logs
RULE_KEYS_CONCAT_IN_ORDER = "keys: concatenate catalog lists in request-key order"
RULE_DUPLICATE_KEYS_REPEAT = "duplicates: repeated keys repeat their ads, no de-duplication"
RULE_MATCHED_UNCAPPED = "matched: full concatenation returned, no MAX_ADS_TO_SERVE cap"
RULE_FALLBACK_SAMPLE_CAPPED = "fallback: sample without replacement, capped at MAX_ADS_TO_SERVE"
RULE_ABSENT_REQUEST_REJECTED = "absent request: InvalidRequestError before lookup"
