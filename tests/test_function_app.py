import function_app


def test_all_routes_are_registered():
    names = {f.get_function_name() for f in function_app.app.get_functions()}

    assert names == {
        "getAttendance",
        "getAnnualLeave",
        "getTeamData",
        "getOfficePresence",
        "getBankHolidays",
        "updateRating",
    }
