from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Logging
LOG_LEVEL = config.log_level("LOG_LEVEL", "INFO")

# Attestation oracle (computes f-tokens on our behalf)
FTOKEN_URL = config.text("NSO_FTOKEN_URL", "https://api.imink.app/f")

# Splatoon 3 web view build being mimicked. Scraped out-of-band from the
# web front-end's main.<hash>.js bundle as "<version>-<revision[:8]>".
SPLATOON3_WEB_VIEW_VERSION = config.text("SPLATOON3_WEB_VIEW_VERSION", "1.0.0-5644e7a2")

# Timeouts used by the demo CLI when it builds its own httpx client.
# The library itself never imposes a timeout on callers.
CONNECT_TIMEOUT = config.seconds("NSO_CONNECT_TIMEOUT", 10.0)
REQUEST_TIMEOUT = config.seconds("NSO_REQUEST_TIMEOUT", 30.0)

# Nintendo Account OAuth configuration (hardcoded - not user configurable)
CLIENT_ID = "71b963c1b7b6d119"
REDIRECT_URI = f"npf{CLIENT_ID}://auth"
SCOPES = "openid+user+user.birthday+user.mii+user.screenName"
GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer-session-token"

ACCOUNTS_HOST = "accounts.nintendo.com"
ACCOUNTS_API_HOST = "api.accounts.nintendo.com"
AUTHORIZE_URL = f"https://{ACCOUNTS_HOST}/connect/1.0.0/authorize"
SESSION_TOKEN_URL = f"https://{ACCOUNTS_HOST}/connect/1.0.0/api/session_token"
TOKEN_URL = f"https://{ACCOUNTS_HOST}/connect/1.0.0/api/token"
USER_INFO_URL = f"https://{ACCOUNTS_API_HOST}/2.0.0/users/me"

# Nintendo Switch Online app server
ZNC_HOST = "api-lp1.znc.srv.nintendo.net"
LOGIN_URL = f"https://{ZNC_HOST}/v3/Account/Login"
WEB_SERVICE_TOKEN_URL = f"https://{ZNC_HOST}/v2/Game/GetWebServiceToken"

# Game web services
SPLATOON2_HOST = "app.splatoon2.nintendo.net"
SPLATOON3_HOST = "api.lp1.av5ja.srv.nintendo.net"
SPLATOON3_ORIGIN = f"https://{SPLATOON3_HOST}"
BULLET_TOKEN_URL = f"{SPLATOON3_ORIGIN}/api/bullet_tokens"
GRAPHQL_URL = f"{SPLATOON3_ORIGIN}/api/graphql"
