"""
Use Cases

Organized by area:
- companies/: Vendor company creation, self-service profile, transitions, lookups
- invitations/: Issue, inspect, redeem and expire invitations
- access/: Capability checks and the current principal's access context
- audit/: Audit trail

Import from subdirectories.
"""
