SIGNUP_URL = "/api/auth/signup"
SIGNIN_URL = "/api/auth/signin"
SIGNOUT_URL = "/api/auth/signout"
ME_URL = "/api/auth/me"
HOST_PROFILE_URL = "/api/host/profile"
