"""
IXAccounts - UK statutory accounts as inline XBRL.
"""
