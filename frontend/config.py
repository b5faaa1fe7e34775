APP_NAME = "Employee Tracker"

# Menu labels, in display order
VIEW_EMPLOYEES = "View all employees"
ADD_EMPLOYEE = "Add employee"
UPDATE_EMPLOYEE_ROLE = "Update employee role"
VIEW_ROLES = "View all roles"
ADD_ROLE = "Add role"
VIEW_DEPARTMENTS = "View all departments"
ADD_DEPARTMENT = "Add department"
QUIT = "Quit"

MENU_CHOICES = [
    VIEW_EMPLOYEES,
    ADD_EMPLOYEE,
    UPDATE_EMPLOYEE_ROLE,
    VIEW_ROLES,
    ADD_ROLE,
    VIEW_DEPARTMENTS,
    ADD_DEPARTMENT,
    QUIT,
]

NO_MANAGER = "None"

# Columns rendered as currency in tables
CURRENCY_COLUMNS = ("salary",)
