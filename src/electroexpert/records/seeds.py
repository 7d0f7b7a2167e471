# src/electroexpert/records/seeds.py

"""First-run data: demo maintenance entries and the default schematic catalog."""

from __future__ import annotations

from .models import SchematicInput, TaskInput

DEMO_TASKS: tuple[TaskInput, ...] = (
    {
        "title": "Hab 101 - Fuga Agua AC",
        "description": "Bandeja condensador obstruida.",
        "category": "clima",
        "severity": "medium",
        "solution": "Limpieza con nitrógeno a presión.",
    },
    {
        "title": "Cocina - Revisión Hornos",
        "description": "El horno 2 no calienta uniforme.",
        "category": "cocina",
        "severity": "high",
        "solution": "Sustitución resistencia inferior defectuosa.",
    },
    {
        "title": "Piscina - Ajuste pH/Cloro",
        "description": "Niveles fuera de rango.",
        "category": "piscina",
        "severity": "low",
        "solution": "Recalibración de sondas y adición de minorador.",
    },
    {
        "title": "Calentador Central - Error E04",
        "description": "Presostato no activa.",
        "category": "calentador",
        "severity": "critical",
        "solution": "Limpieza de venturi y tubos de silicona.",
    },
    {
        "title": "Hab 202 - Luces Led Parpadeo",
        "description": "Driver en mal estado.",
        "category": "iluminacion",
        "severity": "low",
        "solution": "Cambiado driver 12V 50W.",
    },
    {
        "title": "Cuadro Garaje - Diferencial 01",
        "description": "Disparo intempestivo.",
        "category": "otros",
        "severity": "medium",
        "solution": "Localizada derivación en motor extractor.",
    },
    {
        "title": "Recepción - Toma Datos",
        "description": "Sin conexión internet.",
        "category": "otros",
        "severity": "medium",
        "solution": "Crimpado de nuevo conector RJ45.",
    },
    {
        "title": "Zonas Comunes - Farolas",
        "description": "Vandalismo farola 4.",
        "category": "iluminacion",
        "severity": "medium",
        "solution": "Reposición de cristal y lámpara sodio.",
    },
    {
        "title": "Lavandería - Secadora 3",
        "description": "No gira tambor.",
        "category": "otros",
        "severity": "high",
        "solution": "Cambio de correa de transmisión.",
    },
    {
        "title": "Gimnasio - Cinta Correr",
        "description": "Error sobrecarga.",
        "category": "otros",
        "severity": "low",
        "solution": "Lubricación de tapadera y ajuste tensión.",
    },
)

DEFAULT_SCHEMATICS: tuple[SchematicInput, ...] = (
    {
        "title": "Cuadro Clima General (Chillers)",
        "category": "clima-hvac",
        "img": "https://circuitoelectrico.com/wp-content/uploads/esquema-cuadro-electrico-vivienda-basica.jpg",
    },
    {
        "title": "Grupo Presión ACS - Benidorm Center",
        "category": "acs-calderas",
        "img": "https://ventageneradores.net/blog/wp-content/uploads/2022/10/esquema-conexion-resistencias-trifasicas.jpg",
    },
    {
        "title": "Automatismo Piscina / SPA Cloro",
        "category": "spa-piscina",
        "img": "https://images.squarespace-cdn.com/content/v1/568972c7a12f442f4ec3d9e4/1495047863577-9ST3Q2X1G9Y6C4F1G9O1/Esquema+cuadro+piscina.png",
    },
    {
        "title": "Arranque Extractores Lavandería",
        "category": "cocina-ind",
        "img": "https://www.areatecnologia.com/electricidad/img/arranque_estrella_triangulo.jpg",
    },
    {
        "title": "Distribución Planta 1-5 (Cuadros)",
        "category": "cuadros-gral",
        "img": "https://luzmart.es/wp-content/uploads/cuadro-electrico-vivienda-esquema.jpg",
    },
    {
        "title": "Cuadro General SPA / Wellness",
        "category": "spa-piscina",
        "img": "https://descubre.tiendafotovoltaica.es/wp-content/uploads/2019/12/Esquema-Portero-Electronico.jpg",
    },
    {
        "title": "Instalación Bomba de Incendios",
        "category": "emergencia",
        "img": "https://luzmart.es/wp-content/uploads/esquema-luces-emergencia.jpg",
    },
    {
        "title": "Circuito Cocinas Planta Baja",
        "category": "cocina-ind",
        "img": "https://circuitoelectrico.com/wp-content/uploads/esquemas-instalaciones-enlace-unifilar.jpg",
    },
    {
        "title": "Control Clima Lobby & Recepción",
        "category": "clima-hvac",
        "img": "https://www.coolfy.net/wp-content/uploads/diagrama-conexion-aire-acondicionado-inverter.jpg",
    },
    {
        "title": "Cuadro Maquinaria Ascensores",
        "category": "otros",
        "img": "https://www.bibliocad.com/wp-content/uploads/2020/07/diagrama-electrico-unifilar-de-un-hotel-nuevo.jpg",
    },
)
