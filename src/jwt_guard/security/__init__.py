"""Security – JWT decoding, claim validation and issuance."""
