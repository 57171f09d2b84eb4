# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Wizard steps
    "step.setup": "إعداد المشروع",
    "step.siteplan": "مخطط الأرض",
    "step.license": "رخصة البناء",
    "step.contract": "العقد",
    "step.award": "الترسية",
    "nav.step_locked": "يرجى إكمال اختيارات الإعداد أولاً",

    # Setup validation
    "errors.project_type_required": "يرجى اختيار نوع المشروع",
    "errors.villa_category_required": "يرجى اختيار تصنيف الفيلا",
    "errors.contract_type_required": "يرجى اختيار نوع العقد",
    "errors.internal_code_required": "يرجى إدخال الكود الداخلي",
    "errors.internal_code_odd": "يجب أن ينتهي الكود الداخلي برقم فردي",
    "errors.internal_code_duplicate": "الكود الداخلي مستخدم في مشروع آخر",

    # Owners
    "errors.owners_required": "يرجى إضافة مالك واحد على الأقل",
    "errors.owners_share_sum_100": "مجموع حصص الملاك يجب أن يساوي 100%",
    "errors.owner_authorized_required": "يرجى تحديد المالك المفوض",
    "errors.owner_name_required": "يرجى إدخال اسم المالك {index}",
    "errors.owner_remove_last": "لا يمكن حذف المالك الوحيد",
    "errors.allocation_before_application": "تاريخ التخصيص يجب أن يكون قبل تاريخ الطلب",

    # Financials
    "errors.total_project_value_required": "يرجى إدخال القيمة الإجمالية للمشروع",
    "errors.total_bank_value_invalid": "قيمة تمويل البنك غير صحيحة",
    "errors.owner_value_autocalc": "قيمة حصة المالك غير متطابقة مع الحساب التلقائي، يرجى المحاولة مرة أخرى",

    # Persistence
    "errors.project_create_failed": "تعذر إنشاء المشروع",
    "errors.project_id_missing": "لم يتم استلام معرف المشروع من الخادم",
    "errors.save_in_progress": "جاري الحفظ، يرجى الانتظار",
    "errors.project_required": "يجب حفظ المشروع أولاً",

    # HTTP errors
    "error.http.400": "طلب غير صحيح - يرجى التحقق من البيانات المدخلة",
    "error.http.401": "غير مصرح - يرجى تسجيل الدخول",
    "error.http.403": "غير مسموح - ليس لديك صلاحية للوصول",
    "error.http.404": "غير موجود - لم يتم العثور على المورد المطلوب",
    "error.http.405": "طريقة غير مسموحة",
    "error.http.408": "انتهت مهلة الاتصال - يرجى المحاولة مرة أخرى",
    "error.http.409": "تعارض - البيانات موجودة بالفعل",
    "error.http.413": "الملف كبير جداً - يرجى اختيار ملف أصغر",
    "error.http.422": "بيانات غير صحيحة - يرجى التحقق من الحقول",
    "error.http.429": "عدد الطلبات كبير جداً - يرجى الانتظار قليلاً",
    "error.http.500": "خطأ في الخادم - يرجى المحاولة لاحقاً",
    "error.http.502": "خطأ في الاتصال بالخادم",
    "error.http.503": "الخدمة غير متاحة - يرجى المحاولة لاحقاً",
    "error.http.504": "انتهت مهلة الاتصال بالخادم",
    "error.http.unknown": "خطأ غير معروف ({status})",
    "error.network": "خطأ في الاتصال بالشبكة - يرجى التحقق من اتصال الإنترنت",
    "error.timeout": "انتهت مهلة الاتصال - يرجى المحاولة مرة أخرى",
    "error.unexpected": "حدث خطأ غير متوقع",
    "error.owner_prefix": "المالك {index}",

    # Field labels (server error formatting)
    "field.project_type": "نوع المشروع",
    "field.villa_category": "تصنيف الفيلا",
    "field.contract_type": "نوع العقد",
    "field.internal_code": "الكود الداخلي",
    "field.contract_classification": "تصنيف العقد",
    "field.owner_name_ar": "اسم المالك (عربي)",
    "field.owner_name_en": "اسم المالك (إنجليزي)",
    "field.nationality": "الجنسية",
    "field.id_number": "رقم الهوية",
    "field.id_issue_date": "تاريخ إصدار الهوية",
    "field.id_expiry_date": "تاريخ انتهاء الهوية",
    "field.share_percent": "نسبة الحصة",
    "field.phone": "الهاتف",
    "field.email": "البريد الإلكتروني",
    "field.total_project_value": "القيمة الإجمالية للمشروع",
    "field.total_bank_value": "قيمة تمويل البنك",
    "field.total_owner_value": "قيمة حصة المالك",
    "field.allocation_date": "تاريخ التخصيص",
    "field.application_date": "تاريخ الطلب",

    # File field labels (used to name uploaded files)
    "file.application_file": "إرفاق مخطط الأرض",
    "file.building_license_file": "إرفاق رخصة البناء",
    "file.awarding_file": "إرفاق كتاب الترسية",
    "file.id_attachment": "إرفاق بطاقة الهوية",
    "file.contract_file": "إرفاق العقد",
    "file.contract_appendix_file": "إرفاق ملحق العقد",
    "file.contract_explanation_file": "إرفاق إيضاحات العقد",
    "file.start_order_file": "إرفاق أمر المباشرة",
    "file.quantities_table_file": "إرفاق جدول الكميات",
    "file.approved_materials_table_file": "إرفاق جدول المواد المعتمدة",
    "file.price_offer_file": "إرفاق عرض السعر",
    "file.contractual_drawings_file": "إرفاق المخططات التعاقدية",
    "file.general_specifications_file": "إرفاق المواصفات العامة",
    "file.contract_attachment": "مرفق العقد",
    "file.extension_file": "إرفاق كتاب التمديد",
}
