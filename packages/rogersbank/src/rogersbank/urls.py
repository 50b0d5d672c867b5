class RogersBankBaseUrls:
    BASE_URL = "https://rbaccess.rogersbank.com"


class RogersBankApiUrls:
    START = "/?product=ROGERSBRAND"
    AUTHENTICATE = "/issuing/digital/authenticate/user"
    TWO_FACTOR_PREFERENCES = "/issuing/digital/twofactorpasscode/preferences/user"
    GENERATE_TWO_FACTOR_CODE = (
        "/issuing/digital/twofactorpasscode/{account_id}/customer/{customer_id}"
        "/generatecodefordevice"
    )
    VALIDATE_TWO_FACTOR_CODE = "/issuing/digital/authenticate/validatepasscode"
    ACCOUNT = "/issuing/digital/account/{account_id}/customer/{customer_id}"
    ACTIVITY = ACCOUNT + "/activity"
    STATEMENT_SEARCH = ACCOUNT + "/estatement/search"
    STATEMENT_VIEW = ACCOUNT + "/estatement/{statement_id}/view"
