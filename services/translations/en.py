# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Wizard steps
    "step.setup": "Project Setup",
    "step.siteplan": "Site Plan",
    "step.license": "Building License",
    "step.contract": "Contract",
    "step.award": "Awarding",
    "nav.step_locked": "Please complete the setup selections first",

    # Setup validation
    "errors.project_type_required": "Please select a project type",
    "errors.villa_category_required": "Please select a villa category",
    "errors.contract_type_required": "Please select a contract type",
    "errors.internal_code_required": "Please enter the internal code",
    "errors.internal_code_odd": "The internal code must end with an odd digit",
    "errors.internal_code_duplicate": "The internal code is already used by another project",

    # Owners
    "errors.owners_required": "Please add at least one owner",
    "errors.owners_share_sum_100": "Owners' shares must sum to 100%",
    "errors.owner_authorized_required": "Please select the authorized owner",
    "errors.owner_name_required": "Please enter the name of owner {index}",
    "errors.owner_remove_last": "The only owner cannot be removed",
    "errors.allocation_before_application": "Allocation date must be before the application date",

    # Financials
    "errors.total_project_value_required": "Please enter the total project value",
    "errors.total_bank_value_invalid": "Bank value is invalid",
    "errors.owner_value_autocalc": "Owner value does not match the automatic calculation, please try again",

    # Persistence
    "errors.project_create_failed": "Could not create the project",
    "errors.project_id_missing": "The server did not return a project id",
    "errors.save_in_progress": "Saving, please wait",
    "errors.project_required": "The project must be saved first",

    # HTTP errors
    "error.http.400": "Bad request - please check the entered data",
    "error.http.401": "Unauthorized - please log in",
    "error.http.403": "Forbidden - you do not have access",
    "error.http.404": "Not found - the requested resource does not exist",
    "error.http.405": "Method not allowed",
    "error.http.408": "Request timed out - please try again",
    "error.http.409": "Conflict - the data already exists",
    "error.http.413": "File too large - please choose a smaller file",
    "error.http.422": "Invalid data - please check the fields",
    "error.http.429": "Too many requests - please wait a moment",
    "error.http.500": "Server error - please try again later",
    "error.http.502": "Bad gateway",
    "error.http.503": "Service unavailable - please try again later",
    "error.http.504": "Gateway timeout",
    "error.http.unknown": "Unknown error ({status})",
    "error.network": "Network error - please check your connection",
    "error.timeout": "Connection timed out - please try again",
    "error.unexpected": "An unexpected error occurred",
    "error.owner_prefix": "Owner {index}",

    # Field labels (server error formatting)
    "field.project_type": "Project type",
    "field.villa_category": "Villa category",
    "field.contract_type": "Contract type",
    "field.internal_code": "Internal code",
    "field.contract_classification": "Contract classification",
    "field.owner_name_ar": "Owner name (Arabic)",
    "field.owner_name_en": "Owner name (English)",
    "field.nationality": "Nationality",
    "field.id_number": "ID number",
    "field.id_issue_date": "ID issue date",
    "field.id_expiry_date": "ID expiry date",
    "field.share_percent": "Share percent",
    "field.phone": "Phone",
    "field.email": "Email",
    "field.total_project_value": "Total project value",
    "field.total_bank_value": "Bank value",
    "field.total_owner_value": "Owner value",
    "field.allocation_date": "Allocation date",
    "field.application_date": "Application date",

    # File field labels (used to name uploaded files)
    "file.application_file": "Attach Site Plan",
    "file.building_license_file": "Attach Building License",
    "file.awarding_file": "Attach Awarding Letter",
    "file.id_attachment": "Attach ID Card",
    "file.contract_file": "Attach Contract",
    "file.contract_appendix_file": "Attach Contract Appendix",
    "file.contract_explanation_file": "Attach Contract Explanation",
    "file.start_order_file": "Attach Start Order",
    "file.quantities_table_file": "Attach Quantities Table",
    "file.approved_materials_table_file": "Attach Approved Materials Table",
    "file.price_offer_file": "Attach Price Offer",
    "file.contractual_drawings_file": "Attach Contractual Drawings",
    "file.general_specifications_file": "Attach General Specifications",
    "file.contract_attachment": "Contract Attachment",
    "file.extension_file": "Attach Extension Letter",
}
